"""Product catalog service: owner-scoped product CRUD plus bulk soft-delete by owner."""
