"""
Use cases for the user service.

UserService wraps the repository (accounts and one-time tokens), AuthService
issues access tokens, the command handlers in ``commands`` implement the
write flows, and AccountActivationService propagates activation changes to
the product service.
"""
