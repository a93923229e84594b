from sqlassemble.utils import logging

__all__ = ("logging",)
