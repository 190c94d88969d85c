"""
地理领域模型中的仓储接口。
定义用于持久化和检索国家、行政区划、城市区域的仓储接口。
引用完整性和唯一性（国家ISO代码、同一国家内的区划代码）由实现方的存储层保证。
"""
from abc import abstractmethod
from typing import Any, List, Optional

from core.domain.repositories import Repository
from geography.domain.entities import Country, Division, Urban


class CountryRepository(Repository[Country]):
    """
    国家仓储接口。
    """

    @abstractmethod
    def get_by_iso(self, iso: str) -> Optional[Country]:
        """
        根据ISO 3166-1 alpha-2 代码获取国家。

        Args:
            iso: 国家代码，不区分大小写

        Returns:
            找到的国家，如果不存在则返回None
        """


class DivisionRepository(Repository[Division]):
    """
    行政区划仓储接口。
    """

    @abstractmethod
    def list_by_country(self, country_id: int, kind: Any = None) -> List[Division]:
        """
        获取国家下的行政区划。

        Args:
            country_id: 国家ID
            kind: 可选的区划分类过滤，例如只取Province

        Returns:
            行政区划列表
        """


class UrbanRepository(Repository[Urban]):
    """
    城市区域仓储接口。
    """

    @abstractmethod
    def list_by_division(self, division_id: int, kind: Any = None) -> List[Urban]:
        """
        获取行政区划下的城市区域。

        Args:
            division_id: 行政区划ID
            kind: 可选的城市区域分类过滤，例如只取City

        Returns:
            城市区域列表
        """
