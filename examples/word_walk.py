import logging
import random

import chainkov


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Tokens are already split - the chain only counts transitions between them.
TOKENS = "the cat sat on the mat and the dog sat on the cat".split()

chain = chainkov.MarkovChain(rng=random.Random(2024))
chain.observe(TOKENS)

for source in chain.table:
	logger.info(f"{source!r}: {chain.table.get_transitions(source)}")

walk = chain.generate_states("the", 12)

# Dead ends print as ".".
logger.info(" ".join(state or "." for state in walk))
