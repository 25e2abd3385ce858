class RealtorService:
    # TODO: read from the listings and commissions tables once they exist

    @staticmethod
    def dashboard_summary() -> dict:
        return {
            "overview": {
                "managed_properties": 24,
                "active_tenants": 38,
                "monthly_gmv": 125_000_000,
                "commission_rate": 0.08,
            },
            "pipeline": {
                "upcoming_viewings": 6,
                "pending_applications": 9,
                "renewals_this_month": 4,
            },
        }

    @staticmethod
    def earnings_summary() -> dict:
        return {
            "total_commission_to_date": 18_500_000,
            "current_month_commission": 2_350_000,
            "expenses_this_month": 650_000,
            "net_this_month": 1_700_000,
        }
