"""
Decision core: classification, treatment lookup, surveillance scheduling and exports.
"""
