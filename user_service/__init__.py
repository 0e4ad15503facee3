"""User identity service: registration, login (JWT), profile CRUD and account activation."""
