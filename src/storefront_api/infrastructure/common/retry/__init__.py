from storefront_api.infrastructure.common.retry.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
