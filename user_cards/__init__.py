"""
User cards package for the RandomUser API.

This package contains:
- config: .env / environment settings and logging setup
- api_client: HTTP client for RandomUser API
- models: UserRecord parsed from one API result
- dom: headless page and element tree
- state: application state and the context that owns it
- rendering: card and page rendering
- highlight: highlight-by-email controller
- transformations: Pandas table view of the fetched users
- job: page load orchestration and CLI entry point
"""
