from mx_ids_api.app import create_app

__all__ = ["create_app"]
