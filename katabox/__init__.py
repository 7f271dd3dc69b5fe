"""katabox — the Gilded Rose and pair-sum katas.

The Gilded Rose engine ages a shop's stock one day at a time, dispatching
each item to its aging rule by exact name. The pair-sum lookup finds the
first two numbers in a list that add up to a target.

Usage:
    python -m katabox list                       # Show katas
    python -m katabox simulate --days 5          # Age the sample stock
    python -m katabox pairsum 50 10 15 25 35 40  # -> 15 + 35 = 50
"""
