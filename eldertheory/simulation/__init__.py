"""Orbital dynamics, a simulation clock, and a training loop with convergence analysis."""