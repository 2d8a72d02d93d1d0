"""
Todo GraphQL package.

Serves static todo and user collections over GraphQL (todo_graphql.main) and
renders them as a list of todo cards through a small GraphQL client
(todo_graphql.client, todo_graphql.views, todo_graphql.web).
"""
