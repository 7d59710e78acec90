"""
Tests for the Domain Parking Service

Tests are organized by functionality:
- test_host.py, test_csv_import.py: Host resolution, name validation and bulk import parsing
- test_landing.py: Host-keyed landing pages
- test_session_api.py: Sign-up, sessions and token verification
- test_domains_api.py, test_offers_api.py, test_contact_api.py: Seller and public API
- test_admin_api.py: Admin user, domain, content and inquiry management
- test_hosting.py: Vercel client and hosting endpoint
- test_profile_service.py, test_cli.py: Services and command-line tools
"""
