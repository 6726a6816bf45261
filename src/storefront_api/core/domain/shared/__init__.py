from storefront_api.core.domain.shared.clock import utc_now
from storefront_api.core.domain.shared.identifiers import new_id

__all__ = ["new_id", "utc_now"]
