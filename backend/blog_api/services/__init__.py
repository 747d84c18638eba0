# Services package init
"""
Blog API Backend - Services Layer
==================================

What:  State and business rules, independent of HTTP concerns.

Service Inventory:
    - BlogStore: positional in-memory collection of blogs (list, get,
      create, update, delete) with the configurable delete bounds rule
"""
