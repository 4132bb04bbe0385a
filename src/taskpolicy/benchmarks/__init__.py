"""
Synthetic benchmarks of the policies, see `__main__`
"""
