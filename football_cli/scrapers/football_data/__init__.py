"""
football-data.org scraper module.
"""

from .client import FootballDataClient, build_url

__all__ = ['FootballDataClient', 'build_url']
