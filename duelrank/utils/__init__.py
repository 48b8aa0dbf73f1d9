"""numeric helpers, constants and logging setup"""
