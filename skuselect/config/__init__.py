"""Configuration management for skuselect."""

from skuselect.config.settings import SelectorConfig, load_config

__all__ = ["SelectorConfig", "load_config"]
