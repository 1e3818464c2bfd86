"""
Core port-forwarding logic and domain errors.
"""
