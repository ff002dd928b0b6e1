"""Static treatment table, keyed by condition id."""

from types import MappingProxyType

from core.utils import Prescription, Product


PRESCRIPTION_TABLE = MappingProxyType({
    "melanoma": Prescription(
        medication="Refer to Oncologist",
        dosage="Professional medical evaluation required",
        duration="Immediate medical attention needed",
        precautions=(
            "Avoid sun exposure",
            "Use broad-spectrum sunscreen",
            "Regular skin checks",
            "Document any changes",
        ),
        alternatives=("Surgery", "Immunotherapy", "Targeted therapy"),
        recommended_products=(
            Product(
                name="La Roche-Posay Anthelios Melt-In Sunscreen SPF 100",
                type="Sun Protection",
                description="High protection sunscreen specifically formulated for sensitive skin",
                usage="Apply generously 15 minutes before sun exposure, reapply every 2 hours",
                purchase_link="https://www.laroche-posay.us",
                price="$33.50",
            ),
            Product(
                name="EltaMD UV Pure Broad-Spectrum SPF 47",
                type="Sun Protection",
                description="Mineral-based sunscreen suitable for sensitive skin",
                usage="Apply daily before sun exposure",
                purchase_link="https://eltamd.com",
                price="$27.00",
            ),
        ),
    ),
    "vitiligo": Prescription(
        medication="Tacrolimus",
        dosage="0.1% ointment",
        duration="Apply twice daily for 3-6 months",
        precautions=(
            "Use sun protection",
            "Monitor skin changes",
            "Avoid skin trauma",
            "Regular follow-up",
        ),
        alternatives=("Topical corticosteroids", "Phototherapy", "Skin grafting"),
        recommended_products=(
            Product(
                name="Protopic Ointment",
                type="Topical Immunomodulator",
                description="Prescription ointment that helps repigment the skin",
                usage="Apply a thin layer to affected areas twice daily",
                purchase_link="https://www.protopic.com",
                price="$45.00",
            ),
            Product(
                name="CeraVe Daily Moisturizing Lotion",
                type="Moisturizer",
                description="Gentle, non-irritating moisturizer with ceramides",
                usage="Apply to affected areas as needed",
                purchase_link="https://www.cerave.com",
                price="$15.99",
            ),
        ),
    ),
    "melasma": Prescription(
        medication="Hydroquinone",
        dosage="4% cream",
        duration="Apply once daily for 8-12 weeks",
        precautions=(
            "Strict sun protection",
            "Use only as directed",
            "Avoid irritants",
            "Stop if irritation occurs",
        ),
        alternatives=("Kojic acid", "Azelaic acid", "Chemical peels"),
        recommended_products=(
            Product(
                name="SkinCeuticals Discoloration Defense",
                type="Skin Brightener",
                description="Multi-phase serum that reduces dark spots and discoloration",
                usage="Apply a few drops to affected areas once daily",
                purchase_link="https://www.skinceuticals.com",
                price="$98.00",
            ),
            Product(
                name="Neutrogena Clear Face Sunscreen SPF 55",
                type="Sun Protection",
                description="Lightweight, oil-free sunscreen for daily use",
                usage="Apply liberally 15 minutes before sun exposure",
                purchase_link="https://www.neutrogena.com",
                price="$12.99",
            ),
        ),
    ),
    "impetigo": Prescription(
        medication="Mupirocin",
        dosage="2% topical ointment",
        duration="Apply 3 times daily for 7-10 days",
        precautions=(
            "Keep affected area clean",
            "Avoid scratching",
            "Wash hands frequently",
            "Complete full course of treatment",
        ),
        alternatives=("Oral antibiotics", "Antiseptic solutions"),
        recommended_products=(
            Product(
                name="Bactroban Ointment",
                type="Antibiotic Ointment",
                description="Prescription antibiotic ointment for treating impetigo",
                usage="Apply a thin layer to affected areas three times daily",
                purchase_link="https://www.bactroban.com",
                price="$30.00",
            ),
            Product(
                name="Hibiclens Antiseptic Skin Cleanser",
                type="Antimicrobial Cleanser",
                description="Helps prevent spread of bacteria",
                usage="Use daily to clean affected areas",
                purchase_link="https://www.hibiclens.com",
                price="$12.99",
            ),
        ),
    ),
    "acne_vulgaris": Prescription(
        medication="Benzoyl Peroxide",
        dosage="2.5% topical gel",
        duration="Apply once daily for 8-12 weeks",
        precautions=(
            "Avoid sun exposure",
            "Use sunscreen daily",
            "Do not apply on broken skin",
        ),
        alternatives=("Salicylic Acid", "Adapalene"),
        recommended_products=(
            Product(
                name="La Roche-Posay Effaclar Duo",
                type="Acne Treatment",
                description="Dual action acne treatment with benzoyl peroxide",
                usage="Apply a thin layer once daily",
                purchase_link="https://www.laroche-posay.us",
                price="$29.99",
            ),
            Product(
                name="CeraVe Acne Foaming Cream Cleanser",
                type="Facial Cleanser",
                description="Gentle cleanser with benzoyl peroxide",
                usage="Use twice daily, morning and night",
                purchase_link="https://www.cerave.com",
                price="$14.99",
            ),
        ),
    ),
    "eczema": Prescription(
        medication="Hydrocortisone",
        dosage="1% topical cream",
        duration="Apply twice daily for 1-2 weeks",
        precautions=(
            "Do not use on face",
            "Avoid long-term use",
            "Keep skin moisturized",
        ),
        alternatives=("Tacrolimus", "Moisturizing cream"),
        recommended_products=(
            Product(
                name="Eucerin Eczema Relief Cream",
                type="Moisturizing Treatment",
                description="Clinically proven to relieve eczema symptoms",
                usage="Apply to affected areas as needed",
                purchase_link="https://www.eucerin.com",
                price="$14.99",
            ),
            Product(
                name="Aveeno Eczema Therapy Daily Moisturizing Cream",
                type="Daily Moisturizer",
                description="Colloidal oatmeal formula for eczema-prone skin",
                usage="Apply twice daily or as needed",
                purchase_link="https://www.aveeno.com",
                price="$18.99",
            ),
        ),
    ),
    "rosacea": Prescription(
        medication="Metronidazole",
        dosage="0.75% topical cream",
        duration="Apply twice daily for 12 weeks",
        precautions=(
            "Avoid triggers (spicy foods, alcohol)",
            "Use gentle skincare products",
            "Protect from sun",
        ),
        alternatives=("Azelaic acid", "Ivermectin"),
        recommended_products=(
            Product(
                name="Avène Antirougeurs Calm Soothing Repair Mask",
                type="Calming Treatment",
                description="Reduces redness and soothes irritated skin",
                usage="Apply as a mask 2-3 times per week",
                purchase_link="https://www.avene.com",
                price="$35.00",
            ),
            Product(
                name="La Roche-Posay Rosaliac AR Intense",
                type="Anti-Redness Serum",
                description="Targets visible redness and helps prevent its reappearance",
                usage="Apply morning and evening to clean skin",
                purchase_link="https://www.laroche-posay.us",
                price="$39.99",
            ),
        ),
    ),
    "seborrheic_dermatitis": Prescription(
        medication="Ketoconazole",
        dosage="2% shampoo or cream",
        duration="Use twice weekly for 4 weeks",
        precautions=(
            "Keep affected area clean and dry",
            "Avoid harsh soaps",
            "Follow prescribed frequency",
        ),
        alternatives=("Selenium sulfide", "Zinc pyrithione"),
        recommended_products=(
            Product(
                name="Nizoral Anti-Dandruff Shampoo",
                type="Medicated Shampoo",
                description="Contains ketoconazole to treat scalp seborrheic dermatitis",
                usage="Use twice weekly, leave on scalp for 3-5 minutes",
                purchase_link="https://www.nizoral.com",
                price="$15.99",
            ),
            Product(
                name="Head & Shoulders Clinical Strength Shampoo",
                type="Anti-Dandruff Shampoo",
                description="Selenium sulfide formula for severe dandruff and seborrheic dermatitis",
                usage="Use 2-3 times per week or as directed",
                purchase_link="https://www.headandshoulders.com",
                price="$19.99",
            ),
        ),
    ),
    "contact_dermatitis": Prescription(
        medication="Triamcinolone",
        dosage="0.1% topical cream",
        duration="Apply 2-3 times daily for 1-2 weeks",
        precautions=(
            "Identify and avoid triggers",
            "Keep skin clean and dry",
            "Stop use if irritation increases",
        ),
        alternatives=("Calamine lotion", "Cold compresses"),
        recommended_products=(
            Product(
                name="CeraVe Itch Relief Moisturizing Cream",
                type="Soothing Moisturizer",
                description="Provides immediate and long-lasting itch relief",
                usage="Apply to affected areas as needed",
                purchase_link="https://www.cerave.com",
                price="$16.99",
            ),
            Product(
                name="Vanicream Moisturizing Cream",
                type="Gentle Moisturizer",
                description="Free of common chemical irritants, ideal for sensitive skin",
                usage="Apply liberally as often as needed",
                purchase_link="https://www.vanicream.com",
                price="$13.99",
            ),
        ),
    ),
    "psoriasis": Prescription(
        medication="Calcipotriene",
        dosage="0.005% topical cream",
        duration="Apply twice daily for 8 weeks",
        precautions=(
            "Avoid sudden stopping of treatment",
            "Regular sun protection",
            "Monitor skin changes",
        ),
        alternatives=("Coal tar", "Salicylic acid"),
        recommended_products=(
            Product(
                name="Dermarest Psoriasis Medicated Treatment Gel",
                type="Topical Treatment",
                description="Contains 3% salicylic acid to help remove scales",
                usage="Apply to affected areas 3 times daily",
                purchase_link="https://www.dermarest.com",
                price="$24.99",
            ),
            Product(
                name="MG217 Psoriasis Coal Tar Ointment",
                type="Coal Tar Treatment",
                description="Helps slow skin cell growth and reduce inflammation",
                usage="Apply 1-4 times daily or as directed",
                purchase_link="https://www.mg217.com",
                price="$19.99",
            ),
        ),
    ),
    "fungal_infection": Prescription(
        medication="Clotrimazole",
        dosage="1% topical cream",
        duration="Apply twice daily for 2-4 weeks",
        precautions=(
            "Keep affected area dry",
            "Complete full course of treatment",
            "Avoid sharing personal items",
        ),
        alternatives=("Miconazole", "Terbinafine"),
        recommended_products=(
            Product(
                name="Lamisil AT Cream",
                type="Antifungal Treatment",
                description="Contains terbinafine for effective fungal treatment",
                usage="Apply to affected areas twice daily",
                purchase_link="https://www.lamisil.com",
                price="$17.99",
            ),
            Product(
                name="Lotrimin Ultra Antifungal Cream",
                type="Antifungal Treatment",
                description="Fast-acting formula with butenafine hydrochloride",
                usage="Apply twice daily to affected areas",
                purchase_link="https://www.lotrimin.com",
                price="$15.99",
            ),
        ),
    ),
    "urticaria": Prescription(
        medication="Cetirizine",
        dosage="10mg oral tablet",
        duration="Take once daily as needed",
        precautions=(
            "Avoid known triggers",
            "Keep track of potential allergens",
            "Seek emergency care if breathing affected",
        ),
        alternatives=("Fexofenadine", "Loratadine"),
        recommended_products=(
            Product(
                name="Zyrtec 24 Hour Allergy Relief",
                type="Oral Antihistamine",
                description="Fast-acting allergy relief that lasts all day",
                usage="Take one tablet daily",
                purchase_link="https://www.zyrtec.com",
                price="$24.99",
            ),
            Product(
                name="CeraVe Itch Relief Moisturizing Lotion",
                type="Soothing Lotion",
                description="Provides relief from hives and skin allergies",
                usage="Apply to affected areas as needed",
                purchase_link="https://www.cerave.com",
                price="$15.99",
            ),
        ),
    ),
    "folliculitis": Prescription(
        medication="Mupirocin",
        dosage="2% topical ointment",
        duration="Apply three times daily for 10 days",
        precautions=(
            "Keep area clean",
            "Avoid tight clothing",
            "Do not share personal items",
        ),
        alternatives=("Chlorhexidine wash", "Tea tree oil"),
        recommended_products=(
            Product(
                name="PanOxyl Acne Foaming Wash",
                type="Antimicrobial Cleanser",
                description="Contains 10% benzoyl peroxide to fight bacteria",
                usage="Use once or twice daily in shower",
                purchase_link="https://www.panoxyl.com",
                price="$11.99",
            ),
            Product(
                name="The Body Shop Tea Tree Oil",
                type="Natural Treatment",
                description="Pure tea tree oil for natural antimicrobial treatment",
                usage="Apply diluted to affected areas twice daily",
                purchase_link="https://www.thebodyshop.com",
                price="$14.00",
            ),
        ),
    ),
    "hyperpigmentation": Prescription(
        medication="Hydroquinone",
        dosage="2% topical cream",
        duration="Apply twice daily for 8-12 weeks",
        precautions=(
            "Always use sunscreen",
            "Avoid sun exposure",
            "Discontinue if irritation occurs",
        ),
        alternatives=("Kojic acid", "Vitamin C serum"),
        recommended_products=(
            Product(
                name="The Ordinary Alpha Arbutin 2% + HA",
                type="Brightening Treatment",
                description="Reduces appearance of dark spots and hyperpigmentation",
                usage="Apply a few drops twice daily",
                purchase_link="https://theordinary.com",
                price="$8.90",
            ),
            Product(
                name="SkinCeuticals C E Ferulic",
                type="Antioxidant Serum",
                description="Vitamin C serum that helps improve uneven skin tone",
                usage="Apply 4-5 drops every morning",
                purchase_link="https://www.skinceuticals.com",
                price="$166.00",
            ),
        ),
    ),
})
