"""
SeedLoader - Loads static reference data from JSON seed files
Sites for the map and chat lookups, default marketplace listings
"""

import json
from pathlib import Path
from typing import Optional, List, Dict
import logging

from pydantic import ValidationError

from johar.config import settings
from johar.models.schemas import Site, MarketItem

logger = logging.getLogger(__name__)


class SeedLoader:
    """Loads and queries seed data from JSON files"""

    def __init__(self, seed_data_dir: str = None):
        """
        Initialize SeedLoader

        Args:
            seed_data_dir: Path to seed_data directory. If None, uses settings.
        """
        self.seed_dir = Path(seed_data_dir or settings.SEED_DATA_DIR)

        # Cache loaded data
        self._sites_cache: Optional[List[Site]] = None
        self._market_cache: Optional[List[MarketItem]] = None

        logger.info(f"SeedLoader initialized with seed_dir: {self.seed_dir}")

    def _load_json(self, filename: str) -> List[Dict]:
        """Load JSON file and return data"""
        filepath = self.seed_dir / filename

        if not filepath.exists():
            logger.warning(f"Seed file not found: {filepath}")
            return []

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.error(f"Failed to parse {filename}: {e}")
            return []
        except OSError as e:
            logger.error(f"Error loading {filename}: {e}")
            return []

        # JSON structure: {"sites": [...]} or {"market_items": [...]}
        if isinstance(data, dict):
            if not data:
                logger.warning(f"Seed file {filename} is empty")
                return []
            data = next(iter(data.values()))

        if not isinstance(data, list):
            logger.error(f"Seed file {filename} does not hold a list of entries")
            return []

        logger.info(f"Loaded {len(data)} entries from {filename}")
        return data

    def load_sites(self) -> List[Site]:
        """Load all tourist sites"""
        if self._sites_cache is None:
            sites = []
            for entry in self._load_json("sites.json"):
                try:
                    sites.append(Site(**entry))
                except (TypeError, ValidationError) as e:
                    logger.warning(f"Skipping invalid site entry {entry!r}: {e}")
            self._sites_cache = sites
        return self._sites_cache

    def load_market_items(self) -> List[MarketItem]:
        """Load default marketplace listings"""
        if self._market_cache is None:
            items = []
            for entry in self._load_json("market_items.json"):
                try:
                    items.append(MarketItem(**entry))
                except (TypeError, ValidationError) as e:
                    logger.warning(f"Skipping invalid market item {entry!r}: {e}")
            self._market_cache = items
        return self._market_cache


# Singleton instance
_seed_loader_instance = None

def get_seed_loader() -> SeedLoader:
    """Get singleton SeedLoader instance"""
    global _seed_loader_instance
    if _seed_loader_instance is None:
        _seed_loader_instance = SeedLoader()
    return _seed_loader_instance
