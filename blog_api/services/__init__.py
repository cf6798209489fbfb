# Services package init
"""
Blog API: Services Layer
==========================

What:  Post handlers sitting between routes (HTTP) and MongoDB (persistence).
How:   Services take the collection and raw request input, run preconditions,
       make one store call and return a `Result`.

Service Inventory:
    - PostService: create / list / read / update / remove for posts
"""
