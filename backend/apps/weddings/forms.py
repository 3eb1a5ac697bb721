from django import forms


class WeddingForm(forms.Form):
    title = forms.CharField(label="Název", max_length=200)
    slug = forms.CharField(
        label="Adresa",
        max_length=100,
        help_text="Část URL, například 'trnkovi'.",
    )
