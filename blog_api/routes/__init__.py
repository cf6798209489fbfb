# Routes package init
"""
Blog API: API Routes Package
==============================

Route Inventory:
    - posts.py:   POST   /api/posts            (create)
                  GET    /api/posts            (list, paginated)
                  GET    /api/posts/{id}       (read)
                  DELETE /api/posts/{id}       (remove)
                  PATCH  /api/posts/{id}       (partial update)
    - health.py:  GET    /health               (service health check)

Routes stay thin: pull data from the request, call PostService, and let
`blog_api.responses.render` turn the Result into a response.
"""
