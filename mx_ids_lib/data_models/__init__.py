"""
Pydantic data models shared by the library, the REST API and the client.
"""
