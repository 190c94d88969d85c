from django.apps import AppConfig


class GeographyConfig(AppConfig):
    default_auto_field = 'django.db.models.AutoField'
    name = 'geography'
    verbose_name = "地理参考数据"
