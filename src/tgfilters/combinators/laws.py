"""Combinator laws and algebra documentation."""

# Filters under and_/or_/not_ satisfy the laws of a boolean algebra,
# where "==" means "checks the same on every update":
#
# 1. Identity: and_(f, true()) == f, or_(f, false()) == f
#    The empty and_() is true(), the empty or_() is false()
#
# 2. Involution: not_(not_(f)) == f
#
# 3. De Morgan: and_(a, b) == not_(or_(not_(a), not_(b)))
#               or_(a, b) == not_(and_(not_(a), not_(b)))
#
# 4. Commutativity: and_(a, b) == and_(b, a), or_(a, b) == or_(b, a)
#    Holds for results only. Evaluation order is always left to right,
#    so a filter after the deciding one is never checked.
#
# 5. Blacklist: blacklist(*ids) == not_(whitelist(*ids))
#    Updates without a resolvable sender therefore pass every blacklist
