"""
UroStrat - Bladder Cancer Risk Stratification & Treatment Planner
"""
__version__ = "1.0.0"
