"""
HTTP layer of the SocialFeed backend.

    main.py        create_application(), the ASGI app and /uploads mount
    routes.py      /health probes, {API_PREFIX}/auth and {API_PREFIX}/posts
    dependencies/  session, bearer-token user and service injection
    handlers/      one module per router
    middleware/    error envelope and per-request log context

Run from backend/:

    uvicorn socialfeed.api.main:app --reload
"""
