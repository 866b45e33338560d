"""HTTP layer: routes, authentication middleware and error mapping."""
