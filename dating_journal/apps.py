from django.apps import AppConfig


class DatingJournalConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dating_journal'
    verbose_name = 'Dating Journal'
