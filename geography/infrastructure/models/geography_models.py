"""
地理基础设施层数据库模型。
定义与地理领域相关的Django ORM模型。
行政区划和城市区域采用单表继承：同一实体族的所有分类存放在一张表中，由type鉴别列区分。
"""
from django.db import models

from geography.domain.constraints import (
    COUNTRY_ISO_LENGTH,
    DIVISION_ISO_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NATIVE_MAX_LENGTH,
    URBAN_ISO_MAX_LENGTH,
)
from geography.domain.kinds import KIND_MAX_LENGTH, DivisionKind, UrbanKind


class Country(models.Model):
    """国家数据库模型"""
    # 允许调用方预先指定ID（如ISO 3166-1数字代码），否则由数据库分配
    id = models.AutoField(primary_key=True)
    iso = models.CharField(max_length=COUNTRY_ISO_LENGTH, unique=True, verbose_name="ISO代码")
    calling_code = models.PositiveIntegerField(verbose_name="电话区号")
    name = models.CharField(max_length=NAME_MAX_LENGTH, verbose_name="名称")
    native = models.CharField(max_length=NATIVE_MAX_LENGTH, verbose_name="本地名称")
    population = models.PositiveBigIntegerField(default=0, verbose_name="人口")

    class Meta:
        db_table = 'country'
        verbose_name = "国家"
        verbose_name_plural = "国家"
        ordering = ['id']

    def __str__(self):
        return self.name


class Division(models.Model):
    """行政区划数据库模型，所有区划分类共用一张表"""
    id = models.AutoField(primary_key=True)
    type = models.CharField(
        max_length=KIND_MAX_LENGTH,
        choices=DivisionKind.choices(),
        verbose_name="区划分类"
    )
    country = models.ForeignKey(
        Country,
        on_delete=models.CASCADE,
        related_name='divisions',
        verbose_name="所属国家"
    )
    iso = models.CharField(max_length=DIVISION_ISO_MAX_LENGTH, verbose_name="区划代码")
    name = models.CharField(max_length=NAME_MAX_LENGTH, verbose_name="名称")
    native = models.CharField(max_length=NATIVE_MAX_LENGTH, verbose_name="本地名称")
    population = models.PositiveBigIntegerField(default=0, verbose_name="人口")

    class Meta:
        db_table = 'division'
        verbose_name = "行政区划"
        verbose_name_plural = "行政区划"
        ordering = ['id']
        indexes = [
            models.Index(fields=['type'], name='idx_division_type'),
            models.Index(fields=['country', 'type'], name='idx_division_country_type'),
        ]
        constraints = [
            # 同一国家内区划代码唯一
            models.UniqueConstraint(fields=['country', 'iso'], name='uniq_division_country_iso'),
        ]

    def __str__(self):
        return f"{self.name} ({self.type})"


class Urban(models.Model):
    """城市区域数据库模型，所有城市区域分类共用一张表"""
    id = models.AutoField(primary_key=True)
    type = models.CharField(
        max_length=KIND_MAX_LENGTH,
        choices=UrbanKind.choices(),
        verbose_name="城市区域分类"
    )
    division = models.ForeignKey(
        Division,
        on_delete=models.CASCADE,
        related_name='urbans',
        verbose_name="所属行政区划"
    )
    name = models.CharField(max_length=NAME_MAX_LENGTH, verbose_name="名称")
    native = models.CharField(max_length=NATIVE_MAX_LENGTH, verbose_name="本地名称")
    iso = models.CharField(max_length=URBAN_ISO_MAX_LENGTH, verbose_name="代码")

    class Meta:
        db_table = 'urban'
        verbose_name = "城市区域"
        verbose_name_plural = "城市区域"
        ordering = ['id']
        indexes = [
            models.Index(fields=['type'], name='idx_urban_type'),
            models.Index(fields=['division', 'type'], name='idx_urban_division_type'),
        ]

    def __str__(self):
        return f"{self.name} ({self.type})"
