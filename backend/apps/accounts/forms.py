"""
Forms for the account pages.
"""

from django import forms
from django.contrib.auth import password_validation


class RegistrationForm(forms.Form):
    email = forms.EmailField(label="E-mail", max_length=254)
    password = forms.CharField(label="Heslo", strip=False, widget=forms.PasswordInput)
    password_confirm = forms.CharField(
        label="Heslo znovu", strip=False, widget=forms.PasswordInput
    )

    def clean(self):
        cleaned_data = super().clean()
        password = cleaned_data.get("password")
        confirm = cleaned_data.get("password_confirm")

        if password and confirm and password != confirm:
            self.add_error("password_confirm", "Hesla se neshodují.")

        if password:
            try:
                password_validation.validate_password(password)
            except forms.ValidationError as exc:
                self.add_error("password", exc)

        return cleaned_data
