"""
Adapters Layer - Interface Adapters e Frameworks & Drivers.

Implementa os Ports definidos em userhub.core. Depende do Core,
nunca o contrário.
"""
