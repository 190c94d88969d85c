from geography.infrastructure.models.geography_models import Country, Division, Urban

__all__ = ['Country', 'Division', 'Urban']
