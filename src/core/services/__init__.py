"""Services that orchestrate the eligibility check.

They depend on `core.interfaces` contracts, not on concrete adapters, except
where the proxy wires the Neynar adapter from settings.
"""
