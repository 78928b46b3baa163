"""User-facing strings of the profile editor, keyed by language tag then string id."""

from config.constants import Language

EN = {
    "loading_profile": "Loading profile...",
    "edit_profile": "Edit Profile",
    "edit_profile_subtitle": "Update your profile information",
    "personal_information": "Personal Information",
    "name": "Name",
    "name_placeholder": "Your name",
    "email": "Email",
    "email_placeholder": "Your email",
    "phone": "Phone Number",
    "phone_placeholder": "Your phone number",
    "recommendations_title": "Recommendations / Testimonials",
    "add_new_recommendation": "Add New Recommendation",
    "author": "Author",
    "author_placeholder": "Author name",
    "content": "Content",
    "content_placeholder": "Recommendation content",
    "rating": "Rating",
    "star": "Star",
    "stars": "Stars",
    "add_recommendation": "Add Recommendation",
    "existing_recommendations": "Existing Recommendations",
    "no_recommendations": "No recommendations found",
    "profile_picture": "Profile Picture",
    "upload_picture": "Upload picture",
    "save": "Save",
    "saving": "Saving...",
    "cancel": "Cancel",
    "toast_error": "Error",
    "toast_success": "Success",
    "error_generic": "Something went wrong",
    "error_image_too_large": "Image must be smaller than {limit}",
    "error_image_type": "Only image files are accepted",
    "error_author_content_required": "Author and content are required",
    "error_invalid_rating": "Rating must be between 1 and 5",
    "recommendation_added": "Recommendation added successfully",
    "recommendation_removed": "Recommendation removed successfully",
    "profile_updated": "Profile updated successfully",
    "profile_update_failed": "Error updating profile",
}

HI = {
    "loading_profile": "प्रोफ़ाइल लोड हो रहा है...",
    "edit_profile": "प्रोफ़ाइल संपादित करें",
    "edit_profile_subtitle": "अपनी प्रोफ़ाइल जानकारी अपडेट करें",
    "personal_information": "व्यक्तिगत जानकारी",
    "name": "नाम",
    "name_placeholder": "आपका नाम",
    "email": "ईमेल",
    "email_placeholder": "आपका ईमेल",
    "phone": "फ़ोन नंबर",
    "phone_placeholder": "आपका फ़ोन नंबर",
    "recommendations_title": "अनुशंसाएं / प्रशंसापत्र",
    "add_new_recommendation": "नई अनुशंसा जोड़ें",
    "author": "लेखक",
    "author_placeholder": "लेखक का नाम",
    "content": "सामग्री",
    "content_placeholder": "अनुशंसा सामग्री",
    "rating": "रेटिंग",
    "star": "तारा",
    "stars": "तारे",
    "add_recommendation": "अनुशंसा जोड़ें",
    "existing_recommendations": "मौजूदा अनुशंसाएं",
    "no_recommendations": "कोई अनुशंसा नहीं मिली",
    "profile_picture": "प्रोफ़ाइल चित्र",
    "upload_picture": "चित्र अपलोड करें",
    "save": "सहेजें",
    "saving": "सहेजा जा रहा है...",
    "cancel": "रद्द करें",
    "toast_error": "त्रुटि",
    "toast_success": "सफल",
    "error_generic": "कुछ गलत हो गया",
    "error_image_too_large": "छवि {limit} से छोटी होनी चाहिए",
    "error_image_type": "केवल छवि फ़ाइलें स्वीकार्य हैं",
    "error_author_content_required": "लेखक और सामग्री आवश्यक है",
    "error_invalid_rating": "रेटिंग 1 से 5 के बीच होनी चाहिए",
    "recommendation_added": "अनुशंसा जोड़ी गई",
    "recommendation_removed": "अनुशंसा हटा दी गई",
    "profile_updated": "प्रोफ़ाइल सफलतापूर्वक अपडेट किया गया",
    "profile_update_failed": "प्रोफ़ाइल अपडेट करने में त्रुटि",
}

STRINGS: dict[str, dict[str, str]] = {
    Language.ENGLISH.value: EN,
    Language.HINDI.value: HI,
}
