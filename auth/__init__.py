"""auth/ -- Authentication package for Cyber Kittens.

Layer rule: auth/ imports only core/ + third-party libraries.
It does NOT import from api/, web/, or kittens/.
api/, web/, and kittens/ import from auth/, not the other way around.
"""
