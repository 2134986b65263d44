from django.apps import AppConfig


class DatingIdeasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dating_ideas'
    verbose_name = 'Dating Ideas'
