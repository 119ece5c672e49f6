"""Chama System package.

Group onboarding and role-based navigation for savings collectives, organized
by feature modules (roles, groups, auth, ...) with a thin Flask controller
layer over service/repository layers.
"""
