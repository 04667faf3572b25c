"""
Use Cases

Organized into domain folders; import from the subpackages:
- auth/: Registration and login
- users/: Current-user context
- vaults/: Vault lifecycle, membership and invitation resolution
- invitations/: Cancelling, deleting and listing invitations
- notifications/: The in-app notification inbox
- admin/: Billing integration
"""
