"""Business logic services.

Services contain all business logic and are called by routes.
Handlers accept their repositories explicitly and return response envelopes.
"""
