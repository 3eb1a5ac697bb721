"""
Django management command that seeds the Admin/User roles and the admin account.
"""

from django.core.management.base import BaseCommand

from apps.core.bootstrap import seed_roles_and_admin


class Command(BaseCommand):
    help = 'Create the Admin and User roles and the administrative account if they are missing'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            type=str,
            help='Admin email (defaults to the ADMIN_EMAIL setting)',
        )
        parser.add_argument(
            '--password',
            type=str,
            help='Admin password used only when the account is created',
        )

    def handle(self, *args, **options):
        result = seed_roles_and_admin(
            email=options.get('email'),
            password=options.get('password'),
        )

        if not result.changed:
            self.stdout.write(self.style.SUCCESS("Roles and admin account already present"))
            return

        for role in result.created_roles:
            self.stdout.write(f"  Created role: {role}")
        if result.admin_created:
            self.stdout.write("  Created admin account")
        self.stdout.write(self.style.SUCCESS("Seed complete"))
