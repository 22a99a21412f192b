from .settings import DEFAULT_REGISTRY_PATH, DashboardSettings, SourceSpec, load_settings

__all__ = ["DEFAULT_REGISTRY_PATH", "DashboardSettings", "SourceSpec", "load_settings"]
