"""
地理模块配置文件。
从Django设置中获取地理模块的配置。
"""
from django.conf import settings

# 获取地理模块配置，如果不存在则使用默认值
GEOGRAPHY_SETTINGS = getattr(settings, 'GEOGRAPHY_SETTINGS', {})

# 加载种子数据前是否校验跨数据集的引用（区划 → 国家，城市区域 → 区划）
VERIFY_SEED_REFERENCES = GEOGRAPHY_SETTINGS.get('VERIFY_SEED_REFERENCES', True)

# 加载种子数据时是否逐条记录日志
SEED_LOG_ENTITIES = GEOGRAPHY_SETTINGS.get('SEED_LOG_ENTITIES', False)
