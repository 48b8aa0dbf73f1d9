"""gaussian numeric primitives"""
