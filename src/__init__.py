"""Top-level package for the flight itinerary service.

The service rebuilds the travel order of a set of one-hop flight
tickets. The reconstruction core lives in ``itinerary``; ``api`` exposes
it over HTTP.
"""
