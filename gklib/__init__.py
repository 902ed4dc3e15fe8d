"""General-purpose routines: sorting, priority queues, vector helpers, strings, tokenizing, timers, random numbers, PSSM reading and PageRank."""

__version__ = "0.1.0"