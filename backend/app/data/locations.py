"""Dhaka territory directory: zone -> thana -> ordered area names."""

LOCATIONS: dict[str, dict[str, list[str]]] = {
    "Zone 1: South-East Dhaka": {
        "Jatrabari Thana": ["Kajla", "Dholipar", "Golapbagh", "Kutubkhali", "Mir Hazirbag", "Saydabad", "Muradpur"],
        "Demra Thana": ["Sanarpar", "Demra Staff Quarter", "Sarulia", "Amulia", "Dogair", "Bholanogor", "Chittagong Road", "Demra", "Signboard"],
        "Kadamtali Thana": ["Rayerbag", "Jurain", "Saddam Market", "Meraj Nagar", "Mohammadbag", "Gas road", "Khanka road", "Shonir Akra", "Mujahid Nagar", "Giridhara"],
        "Shyampur Thana": ["Shyampur Steamer Ghat", "Kelo Barrack", "Shyampur Industrial Area", "Jurain Connector", "Shyampur", "Muradpur"],
        "Shanir Akhra": ["Zia Shoroni", "Palash pur", "Noor pur", "Paterbag", "Japani Bazar", "Adosho school road", "Gobindhapur"],
    },
    "Zone 2: South Dhaka Core (Old Dhaka)": {
        "Sutrapur Thana": ["Rayshaheb Bazar", "Dhupkhola", "Tipu Sultan Road"],
        "Lalbagh Thana": ["Lalbagh Fort Area", "Shahi Mosque", "Kamalbagh"],
        "Chawkbazar Thana": ["English Road", "Chawkbazar Mor", "Borhanuddin Road"],
        "Kotwali Thana": ["Nawabpur", "Islampur", "Tanti Bazar"],
        "Gandaria Thana": ["Gandaria Rail Station Area", "Doniya–Gandaria Link Road"],
        "Wari Thana": ["Wari Boundary", "Judge Court Connector", "Heritage Zone"],
        "Bangshal Thana": ["Bangabandhu Avenue Connector", "Nazimuddin Road"],
    },
    "Zone 3: Central & North-Central Dhaka": {
        "Ramna Thana": ["Bailey Road", "Segunbagicha", "Minto Road"],
        "Shahbag Thana": ["Shahbag Mor", "Dhaka University–Science Lab Connector"],
        "Motijheel Thana": ["Motijheel Commercial Area", "Arambagh", "Kamalapur"],
        "Paltan Thana": ["Shantinagar", "Fakirapool"],
        "Hatirjheel Thana": ["Hatirjheel Link Road", "Rampura"],
        "Shahjahanpur Thana": ["Malibagh Railgate Connector", "Khilgaon Link"],
        "Dhanmondi Thana": ["Dhanmondi 1–32", "Dhanmondi 27"],
        "Kalabagan Thana": ["Lake Circus", "Sonargaon Link"],
        "New Market Thana": ["New Market", "Azimpur Colony"],
        "Sher-e-Bangla Nagar Thana": ["Agargaon", "Manik Mia Avenue"],
    },
    "Zone 4: North-West Dhaka": {
        "Mohammadpur": ["Tajmahal Road", "Bosila", "Jigatola Connector"],
        "Adabor": ["Shewrapara Link", "Satmasjid Road Connector"],
        "Mirpur Model Thana": ["Mirpur 1–12", "Eastern Housing", "Kazipara–Shewrapara"],
        "Shah Ali Thana": ["Bawnia", "Gabtoli Connector"],
        "Pallabi Thana": ["Pallabi Residential Area", "Mirpur DOHS Connector"],
        "Rupnagar Thana": ["Rupnagar Residential Area", "Manikdi"],
        "Darus Salam Thana": ["Technical Mor", "Mirpur–Gabtoli Link"],
        "Kamrangirchar Thana": ["Riverfront Residential Belt"],
        "Hazaribagh Thana": ["Tentultala", "Kalabagan–Dhanmondi Link"],
    },
    "Zone 5: North & North-East Dhaka": {
        "Gulshan": ["Gulshan 1–2", "Lakeside Gulshan"],
        "Banani": ["DOHS", "Banani Commercial Avenue"],
        "Baridhara": ["Baridhara DOHS", "Niketan Area"],
        "Bhatara": ["Bashundhara Residential Area", "Nadda", "Kuril"],
        "Badda": ["Middle Badda", "Notun Bazar", "Pragati Sarani"],
        "Khilkhet": ["Nikunja 1–2", "Airport Connector"],
        "Uttar Khan": ["Mastertek", "Mirertek"],
        "Dakshin Khan": ["Ashiyana Residential Area", "Porabagh"],
        "Uttara (East/West)": ["Uttara Sectors 1–18", "Uttara DOHS"],
        "Turag Thana": ["Turag Riverside Residential Belt"],
        "Cantonment Thana": ["Cantonment Area"],
        "Airport Thana": ["Airport Road", "Kurmitola"],
    },
}