from season_forecast.cli.app import app

__all__ = ["app"]
