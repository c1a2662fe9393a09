"""Plaid personal-finance category to BudgetHero category mapping dump.

Hand-authored export with four logical columns (ledger, BudgetHero category,
Plaid primary, Plaid detailed) written one value per line, so every record
spans four lines. The first four lines are the column headers. Trailing
spaces are part of the source and are cleaned up by the parser.
"""

RAW_PLAID_MAPPING = """\
Ledger 
BudgetHero Category 
Plaid Primary 
Plaid Detailed 
Income 
Income 
INCOME 
INCOME_WAGES 
Income 
Income 
INCOME 
INCOME_INTEREST_EARNED 
Income 
Income 
INCOME 
INCOME_DIVIDENDS 
Income 
Income 
INCOME 
INCOME_RETIREMENT_PENSION 
Income 
Income 
INCOME 
INCOME_TAX_REFUND 
Income 
Income 
INCOME 
INCOME_UNEMPLOYMENT 
Income 
Income 
INCOME 
INCOME_OTHER_INCOME 
Expenses 
Auto & Transport 
TRANSPORTATION 
TRANSPORTATION_GAS 
Expenses 
Auto & Transport 
TRANSPORTATION 
TRANSPORTATION_PUBLIC_TRANSIT 
Expenses 
Auto & Transport 
TRANSPORTATION 
TRANSPORTATION_PARKING 
Expenses 
Auto & Transport 
TRANSPORTATION 
TRANSPORTATION_TOLLS 
Expenses 
Auto & Transport 
TRANSPORTATION 
TRANSPORTATION_TAXIS_AND_RIDE_SHARES 
Expenses 
Auto & Transport 
TRANSPORTATION 
TRANSPORTATION_BIKES_AND_SCOOTERS 
Expenses 
Auto & Transport 
TRANSPORTATION 
TRANSPORTATION_OTHER_TRANSPORTATION 
Expenses 
Food & Drink 
FOOD_AND_DRINK 
FOOD_AND_DRINK_GROCERIES 
Expenses 
Food & Drink 
FOOD_AND_DRINK 
FOOD_AND_DRINK_RESTAURANT 
Expenses 
Food & Drink 
FOOD_AND_DRINK 
FOOD_AND_DRINK_COFFEE 
Expenses 
Food & Drink 
FOOD_AND_DRINK 
FOOD_AND_DRINK_FAST_FOOD 
Expenses 
Food & Drink 
FOOD_AND_DRINK 
FOOD_AND_DRINK_BEER_WINE_AND_LIQUOR 
Expenses 
Food & Drink 
FOOD_AND_DRINK 
FOOD_AND_DRINK_VENDING_MACHINES 
Expenses 
Bills & Utilities 
RENT_AND_UTILITIES 
RENT_AND_UTILITIES_RENT 
Expenses 
Bills & Utilities 
RENT_AND_UTILITIES 
RENT_AND_UTILITIES_GAS_AND_ELECTRICITY 
Expenses 
Bills & Utilities 
RENT_AND_UTILITIES 
RENT_AND_UTILITIES_INTERNET_AND_CABLE 
Expenses 
Bills & Utilities 
RENT_AND_UTILITIES 
RENT_AND_UTILITIES_TELEPHONE 
Expenses 
Bills & Utilities 
RENT_AND_UTILITIES 
RENT_AND_UTILITIES_WATER 
Expenses 
Bills & Utilities 
RENT_AND_UTILITIES 
RENT_AND_UTILITIES_SEWAGE_AND_WASTE_MANAGEMENT 
Expenses 
Shopping  
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_CLOTHING_AND_ACCESSORIES 
Expenses 
Shopping 
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_ELECTRONICS 
Expenses 
Shopping  
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_FURNITURE_AND_HOUSEWARES 
Expenses 
Shopping 
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_DEPARTMENT_STORES 
Expenses 
Shopping  
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_ONLINE_MARKETPLACES 
Expenses 
Shopping  
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_SUPERSTORES 
Expenses 
Shopping  
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_CONVENIENCE_STORES 
Expenses 
Shopping 
GENERAL_MERCHANDISE 
GENERAL_MERCHANDISE_DISCOUNT_STORES 
Expenses 
Medical & Healthcare 
MEDICAL 
MEDICAL_PRIMARY_CARE 
Expenses 
Medical & Healthcare 
MEDICAL 
MEDICAL_DENTAL_CARE 
Expenses 
Medical & Healthcare 
MEDICAL 
MEDICAL_PHARMACIES_AND_SUPPLEMENTS 
Expenses 
Medical & Healthcare 
MEDICAL 
MEDICAL_EYE_CARE 
Expenses 
Medical & Healthcare 
MEDICAL 
MEDICAL_NURSING_CARE 
Expenses 
Pets 
MEDICAL 
MEDICAL_VETERINARY_SERVICES 
Expenses 
Medical & Healthcare 
MEDICAL 
MEDICAL_OTHER_MEDICAL 
Expenses 
Health & Wellness 
PERSONAL_CARE 
PERSONAL_CARE_GYMS_AND_FITNESS_CENTERS 
Expenses 
Bank Fees 
BANK_FEES 
ATM_FEES 
Expenses 
Bank Fees 
BANK_FEES 
OVERDRAFT_FEES 
Expenses 
Bank Fees 
BANK_FEES 
FOREIGN_TRANSACTION_FEES 
Expenses 
Bank Fees 
BANK_FEES 
SERVICE_FEES 
Expenses 
Bank Fees 
BANK_FEES 
INTEREST_CHARGES 
Expenses 
Bank Fees 
BANK_FEES 
OTHER_FEES 
Expenses 
Entertainment 
ENTERTAINMENT 
CASINOS_AND_GAMBLING 
Expenses 
Entertainment 
ENTERTAINMENT 
MUSIC_AND_AUDIO 
Expenses 
Entertainment 
ENTERTAINMENT 
TV_AND_MOVIES 
Expenses 
Entertainment 
ENTERTAINMENT 
VIDEO_GAMES 
Expenses 
Entertainment 
ENTERTAINMENT 
STREAMING_SERVICES 
Expenses 
Entertainment 
ENTERTAINMENT 
OTHER_ENTERTAINMENT 
Expenses 
Home & Garden 
HOME_IMPROVEMENT 
HARDWARE_STORES 
Expenses 
Home & Garden 
HOME_IMPROVEMENT 
HOME_REPAIRS 
Expenses 
Home & Garden 
HOME_IMPROVEMENT 
SECURITY_SERVICES 
Expenses 
Home & Garden 
HOME_IMPROVEMENT 
FURNITURE_AND_DECOR 
Expenses 
Home & Garden 
HOME_IMPROVEMENT 
LANDSCAPING 
Expenses 
Legal 
GENERAL_SERVICES 
FINANCIAL_AND_LEGAL_SERVICES 
Expenses 
Bills & Utilities 
GENERAL_SERVICES 
INSURANCE 
Expenses 
Education 
GENERAL_SERVICES 
EDUCATION 
Expenses 
Family Care  
GENERAL_SERVICES 
CHILDCARE 
Expenses 
Auto & Transport 
GENERAL_SERVICES 
AUTOMOTIVE_SERVICES 
Expenses 
General Services  
GENERAL_SERVICES 
PROFESSIONAL_SERVICES 
Expenses 
General Services 
GENERAL_SERVICES 
OTHER_SERVICES 
Expenses 
Taxes  
GOVERNMENT_AND_NON_PROFIT 
TAXES 
Expenses 
Donations  
GOVERNMENT_AND_NON_PROFIT 
DONATIONS 
Expenses 
Government & Non-Profit 
GOVERNMENT_AND_NON_PROFIT 
GOVERNMENT_FEES 
Expenses 
Government & Non-Profit 
GOVERNMENT_AND_NON_PROFIT 
OTHER_NON_PROFIT 
Expenses 
Bills & Utilities 
SUBSCRIPTIONS 
SUBSCRIPTIONS_STREAMING 
Expenses 
Software & Tech 
SUBSCRIPTIONS 
SUBSCRIPTIONS_SOFTWARE 
Expenses 
Bills & Utilities 
SUBSCRIPTIONS 
SUBSCRIPTIONS_MEDIA 
Expenses 
Bills & Utilities 
SUBSCRIPTIONS 
SUBSCRIPTIONS_OTHER 
Expenses 
Travel & Vacation 
TRAVEL 
TRAVEL_AIRFARE 
Expenses 
Travel & Vacation  
TRAVEL 
TRAVEL_HOTEL 
Expenses 
Travel & Vacation 
TRAVEL 
TRAVEL_CAR_RENTAL 
Expenses 
Travel & Vacation  
TRAVEL 
TRAVEL_OTHER 
Income 
Transfers 
TRANSFER_IN 
TRANSFER_IN_DIRECT_DEPOSIT 
Income 
Transfers 
TRANSFER_IN 
TRANSFER_IN_OTHER 
Expenses 
Transfers 
TRANSFER_OUT 
TRANSFER_OUT_TO_BANK 
Expenses 
Transfers 
TRANSFER_OUT 
TRANSFER_OUT_OTHER 
Expenses 
Loan Payments 
LOAN_PAYMENTS 
LOAN_PAYMENT_MORTGAGE 
Expenses  
Loan Payments 
LOAN_PAYMENTS 
LOAN_PAYMENT_STUDENT 
Expenses  
Loan Payments 
LOAN_PAYMENTS 
LOAN_PAYMENT_PERSONAL 
Expenses  
Credit Card Payment 
LOAN_PAYMENTS 
LOAN_PAYMENT_CREDIT_CARD 
Expenses 
Loan Payments 
LOAN_PAYMENTS 
LOAN_PAYMENT_AUTO 
Expenses  
Loan Payments 
LOAN_PAYMENTS 
LOAN_PAYMENT_OTHER
"""
