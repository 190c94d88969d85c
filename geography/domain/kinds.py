"""
地理分类标签。
行政区划和城市区域的分类是封闭的标签集合，仅用于区分和查询，不携带行为。
标签值即持久化时写入鉴别列(type)的字符串。
"""
from enum import Enum
from typing import Any

from core.domain.exceptions import ValidationException


class _Kind(str, Enum):
    """分类标签基类，值为鉴别字符串"""

    @classmethod
    def parse(cls, value: Any) -> '_Kind':
        """
        将标签成员或字符串（不区分大小写）转换为标签成员。

        Args:
            value: 标签成员或标签名称

        Returns:
            对应的标签成员

        Raises:
            ValidationException: 如果标签未知
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise ValidationException('kind', f"未知的{cls.__name__}标签: {value!r}")

    @classmethod
    def choices(cls):
        """供Django字段使用的(值, 显示名)列表"""
        return [(member.value, member.value) for member in cls]

    def __str__(self) -> str:
        return self.value


class DivisionKind(_Kind):
    """行政区划分类"""
    PROVINCE = "Province"
    STATE = "State"
    REGION = "Region"
    COUNTY = "County"
    CANTON = "Canton"
    DISTRICT = "District"
    MUNICIPALITY = "Municipality"
    TERRITORY = "Territory"
    PREFECTURE = "Prefecture"
    DEPARTMENT = "Department"
    AREA = "Area"
    COMMUNITY = "Community"
    PARISH = "Parish"
    OBLAST = "Oblast"
    VOIVODESHIP = "Voivodeship"
    BANNER = "Banner"
    BARANGAY = "Barangay"
    KAMPONG = "Kampong"
    BARONY = "Barony"
    HUNDRED = "Hundred"
    KINGDOM = "Kingdom"
    PRINCIPALITY = "Principality"
    REGENCY = "Regency"
    REPUBLIC = "Republic"
    RIDING = "Riding"
    THEME = "Theme"
    BANAT = "Banat"


class UrbanKind(_Kind):
    """城市区域分类"""
    CITY = "City"
    TOWN = "Town"
    WARD = "Ward"
    SHIRE = "Shire"
    AMPHOR = "Amphor"
    VILLAGE = "Village"
    HAMLET = "Hamlet"


# 鉴别列的最大长度，需容纳最长的标签
KIND_MAX_LENGTH = 20
