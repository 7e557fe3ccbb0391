# File: api/dependencies/search.py
from fastapi import Depends

from agents.data_acquisition_agent import DataAcquisitionAgent
from config.settings import SearchSettings


def get_search_settings() -> SearchSettings:
    # Read per request so key changes in the environment apply without restart
    return SearchSettings.from_env()


def get_acquisition_agent(
    settings: SearchSettings = Depends(get_search_settings),
) -> DataAcquisitionAgent:
    return DataAcquisitionAgent.from_settings(settings)
