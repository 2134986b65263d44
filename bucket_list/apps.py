from django.apps import AppConfig


class BucketListConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'bucket_list'
    verbose_name = 'Bucket List'
