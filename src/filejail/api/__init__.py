# filejail HTTP API layer
# Created: 2026-10-07
#
# Versioned REST endpoints at /api/v1/, with the older unversioned
# /api/ paths kept as aliases for existing front-ends.
