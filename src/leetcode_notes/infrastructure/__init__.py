"""Infrastructure layer for external dependencies.

Includes the HTTP client, the LeetCode GraphQL client and the note store.
"""
