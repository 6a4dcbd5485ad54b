"""
monkeysim: round-based item-routing simulator

A fixed set of monkeys pass items around. Each round, every monkey
inspects the items it holds, updates each item's worry level with its own
arithmetic rule, and throws the item to one of two other monkeys depending
on a divisibility test.

Core concepts:
- Inspections are counted per monkey
- Relief keeps worry levels bounded (divide by 3, or reduce modulo the
  product of all test divisors)
- Turn order matters: items thrown forward are handled in the same round
- Monkey business = product of the two highest inspection counts
"""

__version__ = "0.1.0"
