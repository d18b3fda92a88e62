"""
Hide Login Settings Form
"""
from django import forms
from .configuration import Configuration, sanitize_slug, slug_collides


class HideLoginSettingsForm(forms.Form):
    login_slug = forms.CharField(label='Login url', max_length=191, required=False)
    redirect_slug = forms.CharField(label='Redirection url', max_length=191, required=False)

    def __init__(self, *args, config: Configuration, **kwargs):
        self.config = config
        kwargs.setdefault('initial', {
            'login_slug': config.login_slug,
            'redirect_slug': config.redirect_slug,
        })
        super().__init__(*args, **kwargs)

    def clean_login_slug(self):
        return sanitize_slug(self.cleaned_data.get('login_slug'))

    def clean_redirect_slug(self):
        return sanitize_slug(self.cleaned_data.get('redirect_slug'))

    def clean(self):
        cleaned = super().clean()
        login_slug = cleaned.get('login_slug')
        redirect_slug = cleaned.get('redirect_slug')

        if login_slug and slug_collides(login_slug, self.config.real_login_path):
            self.add_error('login_slug', 'The login url cannot point at the built-in login page.')

        if login_slug and login_slug == redirect_slug:
            self.add_error('redirect_slug', 'The redirection url must differ from the login url.')

        return cleaned
