"""gcorecloud - Python client core for the Gcore cloud management API.

Provides the pieces every resource module is built from:
- Link-following pagination over collection endpoints
- Typed decoding of collection and single-resource bodies
- Tagged-union decoding of polymorphic objects
- Task payload decoding, request option validation, structured errors

Example:
    ```python
    from gcorecloud import ClientSettings, ServiceClient
    from gcorecloud.regions import list_all_regions

    settings = ClientSettings.from_env()
    with ServiceClient.from_settings(settings, "regions") as client:
        for region in list_all_regions(client):
            print(region.id, region.display_name)
    ```
"""

from gcorecloud.client import ServiceClient
from gcorecloud.config import ClientSettings
from gcorecloud.extract import extract_many, extract_one
from gcorecloud.pagination import LinkedPage, Page, Pager
from gcorecloud.variant import VariantCodec, VariantEnvelope

__version__ = "0.1.0"

__all__ = [
    "ClientSettings",
    "LinkedPage",
    "Page",
    "Pager",
    "ServiceClient",
    "VariantCodec",
    "VariantEnvelope",
    "__version__",
    "extract_many",
    "extract_one",
]
