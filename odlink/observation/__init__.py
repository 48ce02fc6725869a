"""Observation models, link ends and light-time corrections

"""
