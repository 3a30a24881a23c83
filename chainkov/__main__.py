import logging
import os
import random
import sys
import typing

import yaml

import chainkov.markov_chain


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# Upserts applied by the demo, in order. Repeated targets show replacement.
DEMO_EDGES: typing.List[typing.Tuple[str, str, float]] = [
	("a", "c", 0.8),
	("a", "b", 0.8),
	("a", "b", 0.6),
	("a", "a", 0.9),
	("a", "d", 0.6),
	("a", "f", 0.9),
	("a", "c", 0.4),
]


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_chain (chain_config: dict) -> chainkov.markov_chain.MarkovChain:

	"""
	Build the demo chain, logging the table after every upsert.
	"""

	seed = chain_config.get('seed')
	rng = random.Random(seed) if seed is not None else None

	chain = chainkov.markov_chain.MarkovChain(rng=rng)

	extra_edges = [(str(source), str(target), float(weight)) for source, target, weight in chain_config.get('edges') or []]

	for source, target, weight in DEMO_EDGES + extra_edges:
		chain.add_edge(source, target, weight)
		logger.info(f"{chain.edges}")

	return chain


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the chainkov demo driver.
	"""

	if argv is None:
		argv = sys.argv[1:]

	config = load_config(argv[0]) if argv else load_config()

	logging.getLogger().setLevel((config.get('logging') or {}).get('level', 'INFO'))

	chain_config = config.get('chain') or {}
	start = str(chain_config.get('start', 'a'))
	count = int(chain_config.get('count', 8))

	chain = build_chain(chain_config)

	try:
		states = chain.generate_states(start, count)

	except chainkov.markov_chain.InvalidWeightDistribution as exc:
		logger.error(f"Generation failed: {exc}")
		return 1

	logger.info(f"Generated from {start!r}: {states}")

	return 0


if __name__ == "__main__":
	sys.exit(main())
