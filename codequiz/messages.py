"""
User-facing message templates, keyed by language code.
"""

TRANSLATIONS = {
    "en": {
        "verdict_passed": "Great job! Your solution passed all test cases.",
        "verdict_failed": "Your code didn't pass all test cases.",
        "verdict_syntax_issues": "There are syntax issues with your code:",
        "verdict_compile_error": "There appears to be a syntax error in your code.",
        "verdict_review_logic": "Review your logic and try again.",
        "verdict_internal_error": "An error occurred while testing your code.",
        "verdict_internal_error_hint": "Please try again or contact support if the issue persists.",
        "verdict_in_progress": "Tests are already running for this question.",
        "test_case_line": "Test case {num}: {status}",
        "status_passed": "Passed",
        "status_failed": "Failed",
        "grader_output_label": "  Output: {text}",
        "grader_expected_label": "  Expected: {text}",
        "grader_mode_label": "Graded in {mode} mode",
        "tests_passed_notice": "Success! Your solution works correctly. You can proceed to the next question.",
        "tests_failed_notice": "Test Failed: your solution needs some adjustments before proceeding.",
        "quiz_completed": "Quiz Completed! Your score is {score}%.",
        "certificate_eligible": "Your certificate is being generated.",
        "certificate_not_eligible": "A score of {threshold}% is required for a certificate.",
    },
    "fr": {
        "verdict_passed": "Bravo ! Votre solution a réussi tous les cas de test.",
        "verdict_failed": "Votre code n'a pas réussi tous les cas de test.",
        "verdict_syntax_issues": "Votre code présente des problèmes de syntaxe :",
        "verdict_compile_error": "Votre code semble contenir une erreur de syntaxe.",
        "verdict_review_logic": "Revoyez votre logique et réessayez.",
        "verdict_internal_error": "Une erreur s'est produite pendant le test de votre code.",
        "verdict_internal_error_hint": "Réessayez ou contactez le support si le problème persiste.",
        "verdict_in_progress": "Les tests de cette question sont déjà en cours.",
        "test_case_line": "Cas de test {num} : {status}",
        "status_passed": "Réussi",
        "status_failed": "Échoué",
        "grader_output_label": "  Sortie : {text}",
        "grader_expected_label": "  Attendu : {text}",
        "grader_mode_label": "Évalué en mode {mode}",
        "tests_passed_notice": "Succès ! Votre solution fonctionne. Vous pouvez passer à la question suivante.",
        "tests_failed_notice": "Échec : votre solution doit être corrigée avant de continuer.",
        "quiz_completed": "Quiz terminé ! Votre score est de {score}%.",
        "certificate_eligible": "Votre certificat est en cours de génération.",
        "certificate_not_eligible": "Un score de {threshold}% est requis pour obtenir un certificat.",
    },
}


def get_message(key: str, language: str = "en", **kwargs) -> str:
    """Format a message template, falling back to English and then to the key itself."""
    template = TRANSLATIONS.get(language, TRANSLATIONS["en"]).get(key)
    if template is None:
        template = TRANSLATIONS["en"].get(key, key)
    return template.format(**kwargs)
