"""
Replay backtest for two-party wagering matches (FINAL / FROZEN)

Layer responsibilities:
- record     : WHAT a concluded match is (immutable)
- bet        : WHAT a strategy may answer
- strategy   : the decision contract and the read-only Simulator view
- simulation : HOW records are replayed and bankrolls evolve
- report     : read-only consumers of a finished replay

Correctness relies on replay order: a record is decided before it is
indexed, so strategies never see the match they are betting on.
"""
