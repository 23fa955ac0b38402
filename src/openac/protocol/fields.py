"""Message tags.

Keep these in one place to avoid stringly-typed message handling; every
process on either end of a channel must agree on these exact values.
"""

CONFIG = 'MSG::CONFIG'
RECORD = 'MSG::RECORD'
KEEPALIVE = 'MSG::KEEPALIVE'

TAGS = frozenset((CONFIG, RECORD, KEEPALIVE))
