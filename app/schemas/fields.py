# Integer columns are int4 on PostgreSQL and ids / prices must fit in them
MAX_INT = 2**31 - 1
