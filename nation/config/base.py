"""
基础配置文件。
各环境共用的Django配置，环境配置在此基础上覆盖。
"""
from .env import *

INSTALLED_APPS = [
    'geography.apps.GeographyConfig',
]

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

USE_I18N = True
USE_TZ = True

# 地理模块配置
GEOGRAPHY_SETTINGS = {
    'VERIFY_SEED_REFERENCES': VERIFY_SEED_REFERENCES,
    'SEED_LOG_ENTITIES': SEED_LOG_ENTITIES,
}
