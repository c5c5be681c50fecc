"""
Cookie package for the SSO Service.
"""
