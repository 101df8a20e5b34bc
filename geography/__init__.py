"""Geographic reference data: continents, regions, countries and states.

The tables live in the remote squash directory database and are only ever
read by this project.
"""
