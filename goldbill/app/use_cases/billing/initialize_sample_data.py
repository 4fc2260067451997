"""InitializeSampleData Use Case

Seeds a fresh database with sample customers. Does nothing once any
customer exists, so it is safe to run on every start-up.
"""

from typing import Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from goldbill.app.services.unit_of_work import UnitOfWork
from goldbill.app.repositories.customer_repository import CustomerRepository
from goldbill.app.use_cases.errors import store_failed
from goldbill.domain.customer import Customer

SAMPLE_CUSTOMERS: List[Dict[str, str]] = [
    {"customer_id": "CU001", "name": "Rajesh Kumar", "phone": "+91 98765 43210", "email": "rajesh@email.com", "address": "123 Business Street", "city": "Mumbai", "state": "Maharashtra"},
    {"customer_id": "CU002", "name": "Priya Sharma", "phone": "+91 87654 32109", "email": "priya@email.com", "address": "456 Market Road", "city": "Delhi", "state": "NCR"},
    {"customer_id": "CU003", "name": "Amit Patel", "phone": "+91 76543 21098", "email": "amit@email.com", "address": "789 Commerce Lane", "city": "Ahmedabad", "state": "Gujarat"},
    {"customer_id": "CU004", "name": "Sunita Gupta", "phone": "+91 65432 10987", "email": "sunita@email.com", "address": "321 Trade Circle", "city": "Jaipur", "state": "Rajasthan"},
    {"customer_id": "CU005", "name": "Vikash Tiwari", "phone": "+91 54321 09876", "email": "vikash@email.com", "address": "654 Gold Street", "city": "Lucknow", "state": "UP"},
    {"customer_id": "CU006", "name": "Meera Reddy", "phone": "+91 43210 98765", "email": "meera@email.com", "address": "987 Silver Plaza", "city": "Hyderabad", "state": "Telangana"},
    {"customer_id": "CU007", "name": "Rohit Singh", "phone": "+91 32109 87654", "email": "rohit@email.com", "address": "147 Jewel Lane", "city": "Pune", "state": "Maharashtra"},
    {"customer_id": "CU008", "name": "Kavya Nair", "phone": "+91 21098 76543", "email": "kavya@email.com", "address": "258 Diamond Road", "city": "Kochi", "state": "Kerala"},
    {"customer_id": "CU009", "name": "Arjun Mehta", "phone": "+91 10987 65432", "email": "arjun@email.com", "address": "369 Precious Avenue", "city": "Bangalore", "state": "Karnataka"},
    {"customer_id": "CU010", "name": "Deepika Joshi", "phone": "+91 09876 54321", "email": "deepika@email.com", "address": "741 Golden Square", "city": "Indore", "state": "Madhya Pradesh"},
    {"customer_id": "CU011", "name": "Ravi Verma", "phone": "+91 98765 43211", "email": "ravi@email.com", "address": "852 Platinum Park", "city": "Surat", "state": "Gujarat"},
    {"customer_id": "CU012", "name": "Anita Rao", "phone": "+91 87654 32110", "email": "anita@email.com", "address": "963 Crown Colony", "city": "Chennai", "state": "Tamil Nadu"},
    {"customer_id": "CU013", "name": "Manoj Kumar", "phone": "+91 76543 21099", "email": "manoj@email.com", "address": "159 Royal Street", "city": "Kanpur", "state": "UP"},
    {"customer_id": "CU014", "name": "Pooja Agarwal", "phone": "+91 65432 10988", "email": "pooja@email.com", "address": "357 Elite Plaza", "city": "Nagpur", "state": "Maharashtra"},
    {"customer_id": "CU015", "name": "Kiran Yadav", "phone": "+91 54321 09877", "email": "kiran@email.com", "address": "486 Noble Heights", "city": "Bhopal", "state": "Madhya Pradesh"},
    {"customer_id": "CU016", "name": "Sneha Desai", "phone": "+91 43210 98766", "email": "sneha@email.com", "address": "579 Grand Avenue", "city": "Vadodara", "state": "Gujarat"},
    {"customer_id": "CU017", "name": "Ashok Chauhan", "phone": "+91 32109 87655", "email": "ashok@email.com", "address": "680 Regal Road", "city": "Gwalior", "state": "Madhya Pradesh"},
    {"customer_id": "CU018", "name": "Nisha Bansal", "phone": "+91 21098 76544", "email": "nisha@email.com", "address": "791 Imperial Lane", "city": "Meerut", "state": "UP"},
    {"customer_id": "CU019", "name": "Suresh Malhotra", "phone": "+91 10987 65433", "email": "suresh@email.com", "address": "813 Majestic Mall", "city": "Faridabad", "state": "Haryana"},
    {"customer_id": "CU020", "name": "Rekha Sinha", "phone": "+91 09876 54322", "email": "rekha@email.com", "address": "924 Supreme Circle", "city": "Patna", "state": "Bihar"},
    {"customer_id": "CU021", "name": "Vinod Sharma", "phone": "+91 98765 43212", "email": "vinod@email.com", "address": "135 Victory Plaza", "city": "Ludhiana", "state": "Punjab"},
    {"customer_id": "CU022", "name": "Geeta Pandey", "phone": "+91 87654 32111", "email": "geeta@email.com", "address": "246 Triumph Tower", "city": "Agra", "state": "UP"},
    {"customer_id": "CU023", "name": "Dinesh Gupta", "phone": "+91 76543 21000", "email": "dinesh@email.com", "address": "357 Fortune Heights", "city": "Jaipur", "state": "Rajasthan"},
    {"customer_id": "CU024", "name": "Sonal Jain", "phone": "+91 65432 10999", "email": "sonal@email.com", "address": "468 Prosperity Park", "city": "Ajmer", "state": "Rajasthan"},
    {"customer_id": "CU025", "name": "Raj Thakur", "phone": "+91 54321 09888", "email": "raj@email.com", "address": "579 Success Square", "city": "Shimla", "state": "Himachal Pradesh"},
    {"customer_id": "CU026", "name": "Preeti Saxena", "phone": "+91 43210 98777", "email": "preeti@email.com", "address": "680 Excellence Estate", "city": "Dehradun", "state": "Uttarakhand"},
    {"customer_id": "CU027", "name": "Ajay Tripathi", "phone": "+91 32109 87666", "email": "ajay@email.com", "address": "791 Achievement Avenue", "city": "Allahabad", "state": "UP"},
    {"customer_id": "CU028", "name": "Swati Mishra", "phone": "+91 21098 76555", "email": "swati@email.com", "address": "802 Milestone Manor", "city": "Varanasi", "state": "UP"},
    {"customer_id": "CU029", "name": "Harish Goel", "phone": "+91 10987 65444", "email": "harish@email.com", "address": "913 Summit Street", "city": "Chandigarh", "state": "Punjab"},
    {"customer_id": "CU030", "name": "Nidhi Kapoor", "phone": "+91 09876 54333", "email": "nidhi@email.com", "address": "024 Pinnacle Plaza", "city": "Amritsar", "state": "Punjab"},
    {"customer_id": "CU031", "name": "Sandeep Arora", "phone": "+91 98765 43213", "email": "sandeep@email.com", "address": "135 Zenith Zone", "city": "Jalandhar", "state": "Punjab"},
    {"customer_id": "CU032", "name": "Anju Bhatt", "phone": "+91 87654 32112", "email": "anju@email.com", "address": "246 Apex Apartments", "city": "Haridwar", "state": "Uttarakhand"},
    {"customer_id": "CU033", "name": "Naveen Kumar", "phone": "+91 76543 21001", "email": "naveen@email.com", "address": "357 Crown Complex", "city": "Rishikesh", "state": "Uttarakhand"},
    {"customer_id": "CU034", "name": "Shweta Garg", "phone": "+91 65432 10000", "email": "shweta@email.com", "address": "468 Royal Residency", "city": "Mathura", "state": "UP"},
    {"customer_id": "CU035", "name": "Yogesh Pandey", "phone": "+91 54321 09999", "email": "yogesh@email.com", "address": "579 Elite Enclave", "city": "Vrindavan", "state": "UP"},
    {"customer_id": "CU036", "name": "Rashmi Sood", "phone": "+91 43210 98888", "email": "rashmi@email.com", "address": "680 Grand Gateway", "city": "Panipat", "state": "Haryana"},
    {"customer_id": "CU037", "name": "Deepak Sethi", "phone": "+91 32109 87777", "email": "deepak@email.com", "address": "791 Supreme Suites", "city": "Karnal", "state": "Haryana"},
    {"customer_id": "CU038", "name": "Kavita Malhotra", "phone": "+91 21098 76666", "email": "kavita@email.com", "address": "802 Luxury Lodge", "city": "Ambala", "state": "Haryana"},
    {"customer_id": "CU039", "name": "Vivek Sharma", "phone": "+91 10987 65555", "email": "vivek@email.com", "address": "913 Premium Plaza", "city": "Kurukshetra", "state": "Haryana"},
    {"customer_id": "CU040", "name": "Divya Singh", "phone": "+91 09876 54444", "email": "divya@email.com", "address": "024 Sterling Square", "city": "Rohtak", "state": "Haryana"},
    {"customer_id": "CU041", "name": "Anil Gupta", "phone": "+91 98765 43214", "email": "anil@email.com", "address": "135 Golden Gateway", "city": "Hisar", "state": "Haryana"},
    {"customer_id": "CU042", "name": "Sunita Verma", "phone": "+91 87654 32113", "email": "sunita.v@email.com", "address": "246 Diamond District", "city": "Sirsa", "state": "Haryana"},
    {"customer_id": "CU043", "name": "Mukesh Jain", "phone": "+91 76543 21002", "email": "mukesh@email.com", "address": "357 Precious Plaza", "city": "Bhiwani", "state": "Haryana"},
    {"customer_id": "CU044", "name": "Archana Mittal", "phone": "+91 65432 10001", "email": "archana@email.com", "address": "468 Jewel Junction", "city": "Rewari", "state": "Haryana"},
    {"customer_id": "CU045", "name": "Sanjay Ahluwalia", "phone": "+91 54321 09000", "email": "sanjay@email.com", "address": "579 Treasure Towers", "city": "Sonipat", "state": "Haryana"},
    {"customer_id": "CU046", "name": "Madhuri Chopra", "phone": "+91 43210 98000", "email": "madhuri@email.com", "address": "680 Platinum Place", "city": "Palwal", "state": "Haryana"},
    {"customer_id": "CU047", "name": "Rakesh Bhatia", "phone": "+91 32109 87000", "email": "rakesh@email.com", "address": "791 Silver Street", "city": "Gurgaon", "state": "Haryana"},
    {"customer_id": "CU048", "name": "Priyanka Khanna", "phone": "+91 21098 76000", "email": "priyanka@email.com", "address": "802 Gold Grove", "city": "Faridabad", "state": "Haryana"},
    {"customer_id": "CU049", "name": "Vikas Goyal", "phone": "+91 10987 65000", "email": "vikas@email.com", "address": "913 Crystal Court", "city": "Bahadurgarh", "state": "Haryana"},
    {"customer_id": "CU050", "name": "Sapna Aggarwal", "phone": "+91 09876 54000", "email": "sapna@email.com", "address": "024 Emerald Estate", "city": "Jhajjar", "state": "Haryana"},
]


class InitializeSampleData:
    """
    Use Case: Seed sample customers

    Business Rules:
    1. Runs only against an empty customers table
    2. All samples are inserted in a single transaction

    Returns:
        Number of customers inserted (0 when data already existed)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        samples: Optional[List[Dict[str, str]]] = None,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.samples = SAMPLE_CUSTOMERS if samples is None else samples

    async def execute(self) -> Result[int]:
        try:
            if await self.customer_repo.count() > 0:
                return Return.ok(0)

            for sample in self.samples:
                await self.customer_repo.create(Customer(**sample))

            await self.uow.commit()
            return Return.ok(len(self.samples))

        except SQLAlchemyError as e:
            await self.uow.rollback()
            return Return.err(store_failed("initialize sample data", e))
