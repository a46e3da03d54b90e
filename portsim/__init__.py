"""
Cargo identity registry and line codec for the port simulation.
"""
