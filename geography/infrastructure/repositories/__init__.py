from geography.infrastructure.repositories.django_country_repository import DjangoCountryRepository
from geography.infrastructure.repositories.django_division_repository import DjangoDivisionRepository
from geography.infrastructure.repositories.django_urban_repository import DjangoUrbanRepository

__all__ = [
    'DjangoCountryRepository',
    'DjangoDivisionRepository',
    'DjangoUrbanRepository',
]
