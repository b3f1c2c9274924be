"""
Test suite for the page-object framework.

This package contains:
- e2e/: Page objects and live browser flows against a running application
- ui/: Component tests that render HTML fixtures into a real browser
- api/: Live API tests validated against the users contract
- contracts/: Checks of the OpenAPI contract and its validators
- unit/: Fast tests with no browser or network
"""
