"""
Simulation of nondeterministic finite automatons over a fixed transition graph.
"""
