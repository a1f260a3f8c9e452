from ghorgcli.__version__ import __url__, __version__

__all__ = ["__url__", "__version__"]
