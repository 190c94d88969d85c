from django.db import models

# 引用基础设施层的模型
from geography.infrastructure.models.geography_models import (
    Country,
    Division,
    Urban
)
