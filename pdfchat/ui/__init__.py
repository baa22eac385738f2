"""NiceGUI interface - thin visualization layer for the client components.

Responsibilities:
    - Landing, login and signup pages with inline error feedback
    - Dashboard with document upload, conversation and sign-out
    - Re-rendering on navigation, session and conversation changes

Contains no workflow logic. Delegates all state changes to the workspace
components.
"""
