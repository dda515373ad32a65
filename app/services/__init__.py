"""Business logic services.

Services own the store queries; routers stay thin and only map
HTTP <-> service calls.
"""
