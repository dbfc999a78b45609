# Services package init
"""
Bloglist Backend — Services Layer
==================================

What:  Resource handlers sitting between routes (HTTP) and the document store.
How:   Each service receives its DocumentStore (and, for users, the password
       hasher) at construction and returns serialized documents.

Service Inventory:
    - BlogService: list / get / create / update / delete blogs
    - UserService: list users, create a user with a hashed password
"""
