"""API layer: listing surface for the CLI and other front ends.

Key rules:

1. Talk to the collection API only through ResourceAssembler and the URL builders
2. Return typed records from artscope.resources.models, never raw payloads
3. No presentation logic here; cards are built in artscope.output
"""
