"""
Pytest configuration and shared fixtures for series classification tests.
"""

import pytest
import pandas as pd
from datetime import datetime, timedelta, timezone

from seriespick.classifier import PredictionClassifier
from seriespick.config import SeriesConfig


@pytest.fixture
def now():
    """Fixed evaluation instant."""
    return datetime(2023, 4, 20, 23, 0, tzinfo=timezone.utc)


@pytest.fixture
def config():
    return SeriesConfig()


@pytest.fixture
def classifier(config):
    return PredictionClassifier(config)


@pytest.fixture
def series_rows(now):
    """One series in each progression state, as read from CSV."""
    later = (now + timedelta(hours=2)).isoformat()
    earlier = (now - timedelta(minutes=30)).isoformat()
    return [
        {'slug': 'bos-fla', 'top_seed': 'Boston Bruins', 'top_wins': '0',
         'bottom_seed': 'Florida Panthers', 'bottom_wins': '0',
         'next_game_time': later, 'prediction': '4-1'},
        {'slug': 'car-nyi', 'top_seed': 'Carolina Hurricanes', 'top_wins': '0',
         'bottom_seed': 'New York Islanders', 'bottom_wins': '0',
         'next_game_time': earlier, 'prediction': '4-2'},
        {'slug': 'njd-nyr', 'top_seed': 'New Jersey Devils', 'top_wins': '2',
         'bottom_seed': 'New York Rangers', 'bottom_wins': '3',
         'next_game_time': later, 'prediction': 'no-prediction'},
        {'slug': 'tor-tbl', 'top_seed': 'Toronto Maple Leafs', 'top_wins': '4',
         'bottom_seed': 'Tampa Bay Lightning', 'bottom_wins': '2',
         'next_game_time': '', 'prediction': '4-2'},
        {'slug': 'vgk-wpg', 'top_seed': 'Vegas Golden Knights', 'top_wins': '4',
         'bottom_seed': 'Winnipeg Jets', 'bottom_wins': '1',
         'next_game_time': '', 'prediction': '4-3'},
        {'slug': 'edm-lak', 'top_seed': 'Edmonton Oilers', 'top_wins': '1',
         'bottom_seed': 'Los Angeles Kings', 'bottom_wins': '4',
         'next_game_time': '', 'prediction': '4-1'},
        {'slug': 'col-sea', 'top_seed': 'Colorado Avalanche', 'top_wins': '3',
         'bottom_seed': 'Seattle Kraken', 'bottom_wins': '4',
         'next_game_time': '', 'prediction': '4-0'},
        {'slug': 'dal-min', 'top_seed': 'Dallas Stars', 'top_wins': '4',
         'bottom_seed': 'Minnesota Wild', 'bottom_wins': '0',
         'next_game_time': '', 'prediction': 'no-prediction'},
    ]


@pytest.fixture
def series_frame(series_rows):
    """Series rows as a DataFrame with integer win columns."""
    frame = pd.DataFrame(series_rows)
    frame['top_wins'] = frame['top_wins'].astype(int)
    frame['bottom_wins'] = frame['bottom_wins'].astype(int)
    return frame
