"""Domain-level rules for policy search.

This package defines *what* a UI filter or sort means for the policy store
(field names, status normalization, search semantics), independent from
*where* the resulting query is executed (services, repositories, etc.).
"""
