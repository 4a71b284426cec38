"""
Use Cases

Organized by domain folder:
- sessions/: customer sign-up, sign-in, verification, sign-out, profile
- invitations/: board invitation lifecycle
- access/: the board access gate
- members/: board membership management
- actions/: the discriminated customer auth entry point
"""
