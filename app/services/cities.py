from __future__ import annotations

INDIAN_CITIES: list[str] = [
    "Mumbai", "Delhi", "Bangalore", "Hyderabad", "Ahmedabad", "Chennai", "Kolkata",
    "Surat", "Pune", "Jaipur", "Lucknow", "Kanpur", "Nagpur", "Indore", "Thane",
    "Bhopal", "Visakhapatnam", "Patna", "Vadodara", "Ghaziabad", "Ludhiana", "Agra",
    "Nashik", "Faridabad", "Meerut", "Rajkot", "Varanasi", "Srinagar", "Aurangabad",
    "Amritsar", "Navi Mumbai", "Allahabad", "Ranchi", "Coimbatore", "Jabalpur",
    "Gwalior", "Vijayawada", "Jodhpur", "Madurai", "Raipur", "Kota", "Chandigarh",
    "Guwahati", "Solapur", "Mysore", "Bareilly", "Aligarh", "Moradabad", "Jalandhar",
    "Bhubaneswar", "Salem", "Warangal", "Thiruvananthapuram", "Noida", "Jamshedpur",
    "Bhilai", "Cuttack", "Dehradun", "Durgapur", "Asansol", "Rourkela", "Nanded",
    "Kolhapur", "Ajmer", "Ujjain", "Jhansi", "Jammu", "Mangalore", "Erode", "Udaipur",
    "Panipat",
]


def search_cities(query: str, *, limit: int = 5, cities: list[str] | None = None) -> list[str]:
    needle = query.strip().lower()
    candidates = INDIAN_CITIES if cities is None else cities
    matches = [c for c in candidates if needle in c.lower()]
    return matches[:limit]
