from cf_r2_sdk.models.object import ObjectInfo

__all__ = ["ObjectInfo"]
