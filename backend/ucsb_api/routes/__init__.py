# Routes package init
"""
UCSB Resources API — API Routes Package
========================================

Route Inventory:
    - menu_item_reviews.py:        /api/ucsbmenuitemreview
    - recommendation_requests.py:  /api/recommendationrequests
    - organizations.py:            /api/ucsborganization
    - current_user.py:             GET /api/currentUser
    - health.py:                   GET /health

Routes stay thin: guard, bind parameters, call one repository method,
shape the response.
"""
