"""Book network: book sharing and lending backend"""

__version__ = "0.1.0"
