"""
Chainkov - a small weighted, first-order Markov chain for Python.

A chain maps each state label to an ordered set of weighted successor
states. Build it from explicit weights or from observed transition counts,
then sample it one step at a time or as a whole sequence.

- **Explicit weights.** ``add_edge("a", "b", 0.8)`` inserts an edge or
  replaces the weight of an existing one.
- **Frequency counts.** ``increment_edge("a", "b")`` adds 1.0 to an edge,
  and ``observe(tokens)`` counts every consecutive pair of a sequence.
- **Sampling.** ``next_state("a")`` picks a successor with probability
  proportional to its weight. ``generate_states("a", 10)`` walks ten steps.
- **Dead ends.** A state with no outgoing edges yields ``EMPTY_STATE``
  (an empty string), and a walk that reaches one pads the rest of its
  output with it.
- **Repeatable.** Pass ``rng=random.Random(seed)`` for deterministic walks.

Minimal example:

    ```python
    import chainkov

    chain = chainkov.MarkovChain()
    chain.observe(["the", "cat", "sat", "on", "the", "mat"])

    print(chain.generate_states("the", 5))
    ```

Package-level exports: ``MarkovChain``, ``TransitionTable``,
``InvalidWeightDistribution``, ``EMPTY_STATE``.
"""

import chainkov.markov_chain
import chainkov.transition_table


MarkovChain = chainkov.markov_chain.MarkovChain
TransitionTable = chainkov.transition_table.TransitionTable
InvalidWeightDistribution = chainkov.markov_chain.InvalidWeightDistribution
EMPTY_STATE = chainkov.markov_chain.EMPTY_STATE
