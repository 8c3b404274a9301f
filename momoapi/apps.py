from django.apps import AppConfig


class MomoApiAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'momoapi'
    verbose_name = 'MTN MoMo API'
