"""
Purchases App - Coffee Purchase Ledger

Records who bought coffee and when. Purchases are either tied to a roster
participant (and drive the rotation) or to a free-form external buyer name
(history only).

Key Features:
- Participant purchases and external purchases
- Unified history, newest first
- Deletion of single entries and bulk clear

Architecture:
- Models: CoffeePurchase, ExternalPurchase
- Services: PurchaseLedgerService
- Views: function-based API views
- Exceptions: Domain exception hierarchy
"""
