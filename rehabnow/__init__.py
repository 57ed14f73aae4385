"""rehabNow - weekly schedule interpretation for rehabilitation patients."""

__version__ = "0.1.0"
